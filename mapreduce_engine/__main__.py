import sys

from mapreduce_engine.cli import main

sys.exit(main())
