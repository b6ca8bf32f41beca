from meetgeek.main import main

main()
