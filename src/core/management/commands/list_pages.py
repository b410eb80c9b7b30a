"""List stored wiki pages."""

from django.core.management.base import BaseCommand

from wiki.services.page_storage import get_storage_service


class Command(BaseCommand):
    help = "List the titles of all stored wiki pages"

    def handle(self, *args, **options):
        storage = get_storage_service()
        titles = storage.list_pages()

        if not titles:
            self.stdout.write(self.style.WARNING(f"No pages in {storage.pages_path}"))
            return

        for title in titles:
            self.stdout.write(title)
        self.stdout.write(self.style.SUCCESS(f"{len(titles)} pages"))
