import sys

from SFG.cli import main

sys.exit(main())
