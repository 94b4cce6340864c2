"""Quick run script for RFx Studio."""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent))

# Load environment variables
from dotenv import load_dotenv
load_dotenv()


def main():
    """Main entry point."""
    from rfx_studio.main import main as cli_main
    sys.exit(cli_main())


if __name__ == "__main__":
    main()
