import sys

from fuzzyweather.cli import main

sys.exit(main())
