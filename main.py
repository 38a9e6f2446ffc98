from cli import run_cli
import multiprocessing
import sys

if __name__ == '__main__':
    multiprocessing.freeze_support()
    sys.exit(run_cli(sys.argv[1:]))
