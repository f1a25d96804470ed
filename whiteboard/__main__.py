from whiteboard.main import main

main()
