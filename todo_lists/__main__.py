import sys

from todo_lists.cli import main

sys.exit(main())
