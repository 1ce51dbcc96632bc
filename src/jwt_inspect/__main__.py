import sys

from jwt_inspect.cli import main

sys.exit(main())
