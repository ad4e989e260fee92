from __future__ import annotations

from decimal import Decimal

from django.core.management.base import BaseCommand

from modules.produtos.models import Produto

SEED_PRODUTOS = [
    (
        "Notebook Dell",
        "84713012",
        "Notebook com processador Intel Core i7",
        Decimal("2999.99"),
        10,
    ),
    (
        "Smartphone Samsung Galaxy",
        "85171300",
        "Telefones inteligentes (smartphones)",
        Decimal("1899.90"),
        25,
    ),
    (
        "Smart TV LG 55",
        "85287200",
        "Aparelhos receptores de televisão, a cores",
        Decimal("3499.00"),
        8,
    ),
    (
        "Geladeira Brastemp Frost Free",
        "84181000",
        "Combinações de refrigeradores e congeladores",
        Decimal("4299.00"),
        5,
    ),
    (
        "Máquina de Lavar Electrolux",
        "84501100",
        "Máquinas de lavar roupa inteiramente automáticas",
        Decimal("2199.90"),
        7,
    ),
    (
        "Micro-ondas Panasonic",
        "85165000",
        "Fornos de micro-ondas",
        Decimal("649.90"),
        15,
    ),
    ("Fone de Ouvido JBL", "85183000", None, Decimal("299.90"), 40),
    ("Ventilador Arno", "84145110", None, Decimal("189.90"), 0),
]


class Command(BaseCommand):
    help = "Seed database with a catalogue of produtos for development."

    def add_arguments(self, parser):
        parser.add_argument(
            "--clear",
            action="store_true",
            help="Delete every produto before seeding.",
        )

    def handle(self, *args, **options):
        if options["clear"]:
            deleted, _ = Produto.objects.all().delete()
            self.stdout.write(f"Removed {deleted} produtos.")

        self.stdout.write("Seeding produtos...")
        created = self._seed_produtos()

        self.stdout.write(
            self.style.SUCCESS(
                "Seed completed: "
                f"created={created}, "
                f"total={Produto.objects.count()}"
            )
        )

    def _seed_produtos(self) -> int:
        created = 0
        for nome, ncm, descricao, preco, quantidade in SEED_PRODUTOS:
            _, was_created = Produto.objects.get_or_create(
                nome=nome,
                defaults={
                    "ncm": ncm,
                    "descricao_ncm": descricao,
                    "preco": preco,
                    "quantidade": quantidade,
                },
            )
            if was_created:
                created += 1
        return created
