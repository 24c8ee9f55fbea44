import sys

from pocket_translator.main import main

sys.exit(main())
