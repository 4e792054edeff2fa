from sapperbench.cli import main

raise SystemExit(main())
