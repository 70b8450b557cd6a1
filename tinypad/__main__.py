from tinypad.main import main

raise SystemExit(main())
