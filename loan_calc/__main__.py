import sys

from loan_calc.cli import main

sys.exit(main())
