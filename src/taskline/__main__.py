from taskline.main import main

main()
