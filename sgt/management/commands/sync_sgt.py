from django.core.management.base import BaseCommand, CommandError

from sgt.sync_service import SgtSyncService


class Command(BaseCommand):
    help = 'Sync members, tours, standings, tournaments and scorecards from the Simulator Golf Tour'

    def add_arguments(self, parser):
        parser.add_argument('--tournament-limit', type=int, default=None,
                            help='Number of tournaments to sync per active tour')

    def handle(self, *args, **options):
        service = SgtSyncService()
        if options['tournament_limit'] is not None:
            service.tournament_limit = options['tournament_limit']

        result = service.sync_all()

        for error in result.errors:
            self.stderr.write('%s: %s' % (error['step'], error['error']))

        if result.failed:
            raise CommandError('SGT sync failed after %s records' % result.records_synced)

        self.stdout.write(self.style.SUCCESS(
            'Successfully synced %s records with %s errors' % (result.records_synced, len(result.errors))
        ))
