from pomid.cli import main

raise SystemExit(main())
