from nopix.cli import main

raise SystemExit(main())
