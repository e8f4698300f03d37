import sys
from jacobipoisson.cli import main

sys.exit(main())
