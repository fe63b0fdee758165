import sys

from json_field_diff.cli import main

sys.exit(main())
