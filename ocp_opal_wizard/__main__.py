"""Allow ``python -m ocp_opal_wizard``."""

import sys

from ocp_opal_wizard.pipeline import main

sys.exit(main())
