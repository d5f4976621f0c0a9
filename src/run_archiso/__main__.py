from run_archiso.cli import main

raise SystemExit(main())
