from predictive import run
import sys

if __name__ == '__main__':
    sys.exit(run(sys.argv[1:]))
