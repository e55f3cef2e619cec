import sys

from handler_chain.load.cli import main

sys.exit(main())
