import sys

from nettag.cli import main

sys.exit(main())
