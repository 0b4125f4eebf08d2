import sys

from tibetan_iast.cli import main

sys.exit(main())
