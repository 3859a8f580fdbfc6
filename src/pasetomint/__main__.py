from pasetomint.cli import main

raise SystemExit(main())
