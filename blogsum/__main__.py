import sys

from blogsum.client.cli import main

sys.exit(main())
