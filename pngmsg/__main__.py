import sys

from pngmsg.main import main

sys.exit(main())
