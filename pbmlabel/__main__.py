import sys

from pbmlabel.cli import main

sys.exit(main())
