"""Interactive menu for the purge actions."""
from typing import Callable, List, Sequence
import logging

from .base.exceptions import RemoteQueryError
from .base.guarded_action import run_guarded_action
from .factory import ActionFactory
from .models.impact_summary import ImpactSummary
from .models.tally import Tally

logger = logging.getLogger(__name__)

CONFIRM_TOKEN = 'YES'
EXIT_CHOICE = '6'

# Sub-actions run in the listed order
MENU_OPTIONS = {
    '1': ('Delete IMAGES from Airtable (keep records)', ('images',)),
    '2': ('Delete VIDEOS from Airtable (keep records)', ('videos',)),
    '3': ('Delete IMAGES and VIDEOS from Airtable', ('images', 'videos')),
    '4': ('Delete locally downloaded files', ('local',)),
    '5': ('Delete EVERYTHING (Airtable + local files)', ('images', 'videos', 'local')),
    EXIT_CHOICE: ('Exit', ()),
}


class InteractiveController:
    """Menu loop: pick an option, confirm, run the actions, print tallies."""

    def __init__(self, factory: ActionFactory, input_func: Callable[[str], str] = input):
        self.factory = factory
        self.input_func = input_func

    def show_menu(self) -> str:
        print('\n========================================')
        print(' 🗑️  IMAGE DELETER')
        print('========================================\n')
        print('What do you want to delete?')
        print()
        for key, (description, _) in MENU_OPTIONS.items():
            print(f"{key}. {description}")
        print()
        return self.input_func('Choose an option (1-6): ').strip()

    def confirm(self, summary: ImpactSummary) -> bool:
        try:
            answer = self.input_func(f'Are you sure? Type "{CONFIRM_TOKEN}" to confirm: ')
        except EOFError:
            return False
        return answer.upper() == CONFIRM_TOKEN

    def run_actions(self, action_names: Sequence[str]) -> List[Tally]:
        """Run the named actions in order; a failed query aborts the rest."""
        tallies = []
        for name in action_names:
            action = self.factory.create_action(name)
            try:
                tally = run_guarded_action(action, self.confirm)
            except RemoteQueryError as e:
                logger.error(f"\n❌ ERROR: {e}")
                return tallies
            if tally is not None:
                tallies.append(tally)
        return tallies

    def run(self) -> None:
        running = True
        while running:
            try:
                choice = self.show_menu()
            except EOFError:
                choice = EXIT_CHOICE

            if choice == EXIT_CHOICE:
                logger.info('\n👋 Goodbye!')
                running = False
            elif choice in MENU_OPTIONS:
                self.run_actions(MENU_OPTIONS[choice][1])
            else:
                logger.info('❌ Invalid option. Choose 1-6.')

            if running:
                try:
                    self.input_func('\nPress Enter to continue...')
                except EOFError:
                    logger.info('\n👋 Goodbye!')
                    running = False
