""" Main script to run the exercise test cases and print a pass/fail summary. """

import sys

from algo_exercises.cli import main

if __name__ == "__main__":
    sys.exit(main())
