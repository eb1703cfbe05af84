import sys

from groebner_basis.cli import main

sys.exit(main())
