from caffeine.main import main

raise SystemExit(main())
