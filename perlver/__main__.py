from __future__ import annotations

from perlver.main import main

raise SystemExit(main())
