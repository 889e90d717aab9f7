import sys

from thirtydays.bootstrap import main

sys.exit(main())
