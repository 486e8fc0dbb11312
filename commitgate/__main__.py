from commitgate.cli import main

raise SystemExit(main())
