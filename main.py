"""Game entry point"""

from squish.game import Game

if __name__ == "__main__":
    Game().run()
