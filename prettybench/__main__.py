import sys

from prettybench.cli import main

sys.exit(main())
