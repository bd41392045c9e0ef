"""ContextClip launcher"""

import sys

from contextclip.app import main


if __name__ == "__main__":
    sys.exit(main())
