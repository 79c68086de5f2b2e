# -*- coding: utf-8 -*-
"""Patient treatment tracker.

In-memory patient registry with a small treatment workflow
(waiting -> curing -> cured / canceled), served over FastAPI.
"""

__version__ = "1.0.0"
