import sys

from teller_staffing.scripts.run_staffing import main

sys.exit(main())
