import sys
from raycaster.main import main

sys.exit(main())
