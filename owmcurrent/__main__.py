from owmcurrent.cli import main

raise SystemExit(main())
