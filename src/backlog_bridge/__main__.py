"""Entry point for running the Backlog bridge."""

from backlog_bridge import main

if __name__ == "__main__":
    main()
