from notification_hub.main import main

raise SystemExit(main())
