from themes_report.gui.launcher import main

if __name__ == "__main__":  # pragma: no cover
    main()
