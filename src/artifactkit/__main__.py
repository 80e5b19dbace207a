import sys

from artifactkit.cli import main

sys.exit(main())
