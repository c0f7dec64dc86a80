import sys

from git_branch_tidy.cli.main import main

sys.exit(main())
