import sys

from cvr_i18n.main import main

sys.exit(main())
