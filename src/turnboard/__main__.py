from turnboard.app import main

main()
