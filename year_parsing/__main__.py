from year_parsing.cli import main

raise SystemExit(main())
