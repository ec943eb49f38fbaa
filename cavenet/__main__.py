# -*- coding: utf-8 -*-
import sys

from cavenet.commands.main import main

sys.exit(main())
