import sys

from toolbridge.main import main

sys.exit(main())
