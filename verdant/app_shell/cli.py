import argparse
import logging
import sys
from pathlib import Path

from verdant.adapters.memory_backend import InMemoryBackend
from verdant.adapters.supabase_backend import SupabaseBackend
from verdant.api.deps import Settings
from verdant.app_shell.seed import apply_seed, load_seed
from verdant.components.catalog import run_list_admin_products
from verdant.ports.backend import BackendError, BackendPort
from verdant.rules.loader import load_rules

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("cli")


def get_admin_backend(settings: Settings) -> BackendPort:
    if settings.backend == "memory":
        backend = InMemoryBackend()
        if settings.seed_path:
            apply_seed(backend, load_seed(Path(settings.seed_path)))
        return backend
    try:
        return SupabaseBackend.connect(settings.supabase_url, settings.supabase_service_role_key)
    except BackendError as e:
        logger.error("Backend not configured: %s", e)
        sys.exit(1)


def handle_check_rules(settings: Settings, args: argparse.Namespace) -> None:
    path = Path(args.path) if args.path else settings.rules_path
    try:
        rules = load_rules(path)
    except (FileNotFoundError, ValueError) as e:
        logger.error("%s", e)
        sys.exit(1)
    print(f"Rules OK: {rules.project.slug} v{rules.project.rules_version}")
    print(f"Upload bucket: {rules.uploads.bucket}")


def handle_seed(settings: Settings, args: argparse.Namespace) -> None:
    try:
        data = load_seed(Path(args.file))
    except (FileNotFoundError, ValueError) as e:
        logger.error("%s", e)
        sys.exit(1)

    backend = get_admin_backend(settings)
    try:
        counts = apply_seed(backend, data)
    except BackendError as e:
        logger.error("Seeding failed: %s", e)
        sys.exit(1)
    for table, count in counts.items():
        print(f"{table}: {count} rows")


def handle_list_products(settings: Settings, args: argparse.Namespace) -> None:
    result = run_list_admin_products(get_admin_backend(settings))
    for product in result.products:
        print(f"{product.id}  {product.name:<40} {product.category_name:<20} {product.price:>10.2f}")
    print(f"{result.total} products.")


def main() -> None:
    parser = argparse.ArgumentParser(description="Verdant Market CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # check_rules
    rules_parser = subparsers.add_parser("check_rules", help="Validate the rules file")
    rules_parser.add_argument("--path", help="Rules file (default: VERDANT_RULES_PATH)")

    # seed
    seed_parser = subparsers.add_parser("seed", help="Insert seed rows into the backend")
    seed_parser.add_argument("--file", default="seed.yaml", help="YAML seed file")

    # list_products
    subparsers.add_parser("list_products", help="Print the admin product listing")

    args = parser.parse_args()

    settings = Settings()

    if args.command == "check_rules":
        handle_check_rules(settings, args)
    elif args.command == "seed":
        handle_seed(settings, args)
    elif args.command == "list_products":
        handle_list_products(settings, args)


if __name__ == "__main__":
    main()
