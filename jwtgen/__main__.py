from jwtgen.cli import main

raise SystemExit(main())
