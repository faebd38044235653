from openclaw_config_check.cli import main

if __name__ == "__main__":
    main()
