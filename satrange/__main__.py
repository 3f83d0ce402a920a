"""Allow ``python -m satrange``."""

from satrange.main import main

if __name__ == "__main__":
    raise SystemExit(main())
