import sys

from nouncount.cli import main

sys.exit(main())
