import sys

from passport_check.main import main

sys.exit(main())
