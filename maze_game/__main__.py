from maze_game.main import run

run()
