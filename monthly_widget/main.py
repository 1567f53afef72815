#!/usr/bin/env python3
"""Host loop for the monthly widget."""
import time
import signal

from monthly_widget.utils.config import Config
from monthly_widget.display.renderer import Renderer
from monthly_widget.widgets.monthly import MonthlyWidget, DISPLAY_NAME


class WidgetHost:
    """Keeps the widget's timeline fresh and writes rendered frames."""

    def __init__(self, config_path=None, calendar=None):
        """Initialize the host."""
        print(f"Initializing {DISPLAY_NAME}...")

        # Load configuration
        self.config = Config(config_path)
        if self.config.config_path:
            print(f"Configuration loaded from {self.config.config_path}")

        width, height = self.config.get_display_size()
        self.renderer = Renderer(width, height)
        self.widget = MonthlyWidget(self.config, calendar)
        self.output_path = self.config.get_output_path()

        self.check_interval = self.config.get_check_interval()
        print(f"Family: {self.config.get_family()} ({width}x{height}), "
              f"check every {self.check_interval} sec")

        self.running = False
        self.last_entry = None

    def render(self):
        """Render the current entry and write it to the output path."""
        self.renderer.create_canvas()
        bounds = (0, 0, self.renderer.width, self.renderer.height)
        self.widget.render(self.renderer, bounds)
        path = self.renderer.save(self.output_path)
        print(f"Frame written to {path}")

    def run_once(self):
        """Run a single update cycle, rendering only when the shown day changes."""
        self.config.reload()
        updated = self.widget.update_data()
        entry = self.widget.current_entry()
        if updated or entry != self.last_entry:
            self.render()
            self.last_entry = entry
        return updated

    def run(self):
        """Run the main host loop."""
        print("\n" + "=" * 50)
        print(f"Starting {DISPLAY_NAME}")
        print("=" * 50)

        # Setup signal handlers for graceful shutdown
        signal.signal(signal.SIGINT, self._signal_handler)
        signal.signal(signal.SIGTERM, self._signal_handler)

        self.running = True

        try:
            while self.running:
                self.run_once()

                # Sleep in short chunks so signals are handled promptly
                next_check = time.time() + self.check_interval
                while self.running and time.time() < next_check:
                    time.sleep(1)

        except KeyboardInterrupt:
            print("\n\nShutdown requested...")
        except Exception as e:
            print(f"\nError in main loop: {e}")
            raise
        finally:
            self.shutdown()

    def shutdown(self):
        """Clean shutdown."""
        print("Shutting down widget host...")
        self.running = False
        print("Goodbye!")

    def _signal_handler(self, signum, frame):
        """Handle shutdown signals."""
        self.running = False


def main():
    """Entry point."""
    import argparse

    parser = argparse.ArgumentParser(description=DISPLAY_NAME)
    parser.add_argument(
        '--config',
        type=str,
        help='Path to configuration file',
        default=None
    )
    parser.add_argument(
        '--once',
        action='store_true',
        help='Render once and exit (for testing)'
    )

    args = parser.parse_args()

    host = WidgetHost(args.config)

    if args.once:
        host.run_once()
        host.shutdown()
    else:
        host.run()


if __name__ == '__main__':
    main()
