import sys

from i3_window_killer.run import main

sys.exit(main())
