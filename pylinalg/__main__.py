import sys

from pylinalg.cli import main

sys.exit(main())
