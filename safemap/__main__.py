import sys
from safemap.cmdline import main

sys.exit(main())
