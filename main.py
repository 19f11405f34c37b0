# main.py
import sys
from gwint.runner.console import main

if __name__ == "__main__":
    # optional: python main.py "Geralt" "Yennefer"
    main(sys.argv[1:])
