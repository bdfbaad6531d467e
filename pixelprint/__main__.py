"""
Allow running the package with: python -m pixelprint

Examples:
    python -m pixelprint hash photo.jpg          # Hash one image
    python -m pixelprint compare a.jpg b.jpg     # Compare two images
    python -m pixelprint rank q.jpg ./photos     # Rank a folder against q.jpg
    python -m pixelprint config --init           # Create example config file
"""

import sys


def main():
    if len(sys.argv) > 1 and sys.argv[1] == 'config':
        from .user_config import get_user_config

        config = get_user_config()

        if '--init' in sys.argv[2:] or '-i' in sys.argv[2:]:
            if config.create_example_config():
                print("Created example configuration file at:")
                print(f"  {config.config_file_path}")
                print("\nEdit this file to customize pixelprint settings.")
            else:
                print("Failed to create configuration file.")
                sys.exit(1)
        else:
            print(f"Configuration file: {config.config_file_path}")
            if config.config_file_path.exists():
                print("Status: found")
            else:
                print("Status: not found (using defaults)")
                print("\nRun 'python -m pixelprint config --init' to create one.")

            print("\nCurrent settings:")
            print(f"  default_algorithm: {config.default_algorithm}")
            print(f"  default_precision: {config.default_precision}")
            print(f"  default_workers: {config.default_workers}")
            print(f"  resample: {config.resample}")
            print(f"  similarity_ratio: {config.similarity_ratio}")
            print(f"  max_image_pixels: {config.max_image_pixels:,}")
    else:
        from .cli import main as cli_main
        sys.exit(cli_main())


if __name__ == '__main__':
    main()
