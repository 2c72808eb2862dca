import sys

from datainspect.cli import main

sys.exit(main())
