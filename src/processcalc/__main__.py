import sys

from .cli.calculate import main

sys.exit(main())
