"""Allow ``python -m contextclip``"""

import sys

from .app import main

sys.exit(main())
