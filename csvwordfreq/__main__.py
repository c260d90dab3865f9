from csvwordfreq.main import main

raise SystemExit(main())
