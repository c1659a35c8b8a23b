from src.jeopardy_board.app.entrypoint import main

main()
