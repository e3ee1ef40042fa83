import sys

from tsvmat.cli.main import main

sys.exit(main())
