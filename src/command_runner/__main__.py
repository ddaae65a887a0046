import sys

from command_runner.cli import main

sys.exit(main())
