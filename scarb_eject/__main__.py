"""Allow ``python -m scarb_eject``."""

import sys

from scarb_eject.main import main

if __name__ == "__main__":
    sys.exit(main())
