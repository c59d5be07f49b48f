# cli.py
import sys
from datetime import datetime
from typing import Dict, List, Optional

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.prompt import Confirm, Prompt
from rich.text import Text
from rich import box

from prompt_toolkit import prompt
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.styles import Style as PromptStyle

from autoshop.catalog import new_auto_shop, sample_products
from autoshop.config import settings
from autoshop.core import Order, OrderIn
from autoshop.errors import StoreError
from autoshop.ids import ProductID
from autoshop.logs import setup_logging
from autoshop.models import Car, CarAccessory, PRODUCT_TYPE_CAR, PRODUCT_TYPE_CAR_ACCESSORY, Product

console = Console()
shop = new_auto_shop()

status_message = "Ready"

custom_style = PromptStyle.from_dict({
    'completion-menu.completion': 'bg:#008888 #ffffff',
    'completion-menu.completion.current': 'bg:#00aaaa #000000',
    'scrollbar.background': 'bg:#88aaaa',
    'scrollbar.button': 'bg:#222222',
})


# ---------------------------
# Display helpers
# ---------------------------
def _money(amount: float) -> str:
    return f"{amount:,.2f} {settings.CURRENCY}"


def show_products(products: List[Product], title: str = "📦 Products", total: Optional[float] = None):
    if not products:
        console.print("[italic yellow]No products found[/italic yellow]")
        return

    if total is not None:
        title = f"{title} - {len(products)} totalling {_money(total)}"
    table = Table(
        title=title,
        box=box.ROUNDED,
        header_style="bold cyan",
        title_style="bold magenta",
        show_lines=True
    )
    table.add_column("ID", style="dim", width=34)
    table.add_column("Name", style="bold", width=24)
    table.add_column("Type", width=14)
    table.add_column("Category", width=14)
    table.add_column("Price", justify="right", width=18)

    for p in products:
        name = p.name
        if isinstance(p, Car):
            name = f"{p.name}\n[dim]{p.make} {p.model}, {p.color}[/dim]"
        table.add_row(str(p.id), name, p.product_type, p.category, _money(p.price))
    console.print(table)


def show_product_detail(p: Product):
    body = Text()
    body.append(f"{p.description}\n\n")
    body.append("Price: ", style="bold")
    body.append(f"{_money(p.price)}\n", style="green")
    if isinstance(p, Car):
        body.append("Make and Model: ", style="bold")
        body.append(f"{p.make} {p.model} ({p.color})\n")
    for section, lines in p.specifications.items():
        body.append(f"\n{section}\n", style="bold cyan")
        for line in lines:
            body.append(f"  • {line}\n")
    if p.created_at:
        body.append(f"\nAdded {p.created_at:%Y-%m-%d %H:%M:%S}", style="dim")
    console.print(Panel(body, title=f"{p.name} [dim]{p.id}[/dim]", border_style="cyan"))


def show_orders(orders: List[Order], total_paid: float):
    if not orders:
        console.print("[italic yellow]No orders found[/italic yellow]")
        return

    table = Table(
        title=f"📋 {len(orders)} orders totalling {_money(total_paid)}",
        box=box.ROUNDED,
        header_style="bold yellow",
        title_style="bold yellow",
        show_lines=True
    )
    table.add_column("Order ID", style="dim", width=26)
    table.add_column("Buyer", width=16)
    table.add_column("Contents", width=36)
    table.add_column("Paid", justify="right", width=18)

    for order in orders:
        names = ", ".join(p.name for p in order.products[:3])
        if len(order.products) > 3:
            names += f" +{len(order.products) - 3} more"
        table.add_row(str(order.id), order.name, names, _money(order.amount_paid))

    console.print(table)


def show_supported(supported: Dict[str, bool]):
    if not supported:
        console.print("[italic yellow]No type restrictions, every product type is accepted[/italic yellow]")
        return
    table = Table(box=box.ROUNDED, header_style="bold blue")
    table.add_column("Product type")
    table.add_column("Supported", justify="center")
    for product_type, enabled in supported.items():
        table.add_row(product_type, "[green]yes[/green]" if enabled else "[red]no[/red]")
    console.print(table)


def show_status(message: str, is_success: bool = True):
    style = "green" if is_success else "red"
    return Panel.fit(f"[{style}]{message}[/{style}]", title="Status")


# ---------------------------
# Store wrapper with error reporting
# ---------------------------
def try_store(fn, *args, success_msg: Optional[str] = None, **kwargs):
    """
    Calls fn(*args, **kwargs) and returns its result.
    StoreError and bad input are reported and turned into None.
    """
    global status_message
    try:
        result = fn(*args, **kwargs)
    except (StoreError, ValueError) as e:
        detail = getattr(e, "detail", str(e))
        status_message = f"Error: {detail}"
        console.print(show_status(status_message, False))
        return None

    if success_msg:
        status_message = success_msg
        console.print(show_status(success_msg, True))
    return result


# ---------------------------
# Autocompletion helpers
# ---------------------------
def get_product_completer():
    products, _ = shop.available_products()
    return WordCompleter([str(p.id) for p in products], ignore_case=True)


def get_type_completer():
    return WordCompleter(list(shop.all_supported_products()), ignore_case=True)


def create_header():
    header = Table(show_header=False, box=box.ROUNDED)
    header.add_column("left", width=30)
    header.add_column("center", width=40)
    header.add_column("right", width=30)

    now = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    header.add_row(
        f"🚗 {shop.name}",
        "[bold blue]Inventory CLI with Autocomplete[/bold blue]",
        f"[dim]{now}[/dim]"
    )
    return Panel(header, style="bold blue")


# ---------------------------
# Input helpers with autocomplete
# ---------------------------
def prompt_with_autocomplete(message: str, completer=None, default: str = ""):
    return prompt(f"{message} ", completer=completer, style=custom_style, default=default)


def ask_float(message: str, default: float = 0.0) -> float:
    while True:
        raw = Prompt.ask(message, default=str(default))
        try:
            return float(raw)
        except ValueError:
            console.print("[red]Please enter a valid number.[/red]")


def ask_lines(message: str) -> List[str]:
    raw = Prompt.ask(f"{message} (comma separated)", default="")
    return [part.strip() for part in raw.split(",") if part.strip()]


def ask_new_product() -> Product:
    product_type = prompt_with_autocomplete("🏷️ Product type", completer=get_type_completer(), default=PRODUCT_TYPE_CAR)
    fields = dict(
        name=Prompt.ask("Name"),
        price=ask_float(f"💰 Price in {settings.CURRENCY}", default=0.0),
        product_type=product_type,
        category=Prompt.ask("Category", default=""),
        description=Prompt.ask("Description"),
        images=ask_lines("Image URLs"),
    )
    features = ask_lines("Key features")
    fields["specifications"] = {"Key Features": features} if features else {}
    if product_type == PRODUCT_TYPE_CAR:
        return Car(
            make=Prompt.ask("Make"),
            model=Prompt.ask("Model"),
            color=Prompt.ask("Color"),
            year=Prompt.ask("Year", default=""),
            **fields,
        )
    if product_type == PRODUCT_TYPE_CAR_ACCESSORY:
        return CarAccessory(**fields)
    return Product(**fields)


def _parse_product_ids(text: str) -> List[ProductID]:
    return [ProductID.from_hex(part) for part in text.split()]


# ---------------------------
# Main menu
# ---------------------------
def menu():
    global status_message

    console.clear()
    console.print(create_header())

    while True:
        if status_message:
            console.print(show_status(status_message, "Error" not in status_message))

        menu_table = Table.grid(padding=(0, 2))
        menu_table.add_column("Key", style="bold cyan", width=4)
        menu_table.add_column("Option", width=30)
        menu_table.add_column("Key", style="bold cyan", width=4)
        menu_table.add_column("Option", width=30)

        options = [
            ("1", "📦 Available products", "6", "📋 List orders"),
            ("2", "ℹ️ Get product by ID", "7", "🔍 Stock check"),
            ("3", "➕ Add product", "8", "🗑️ Delete products"),
            ("4", "✅ Sell products", "9", "⚙️ Supported types"),
            ("5", "🧾 Sold products", "10", "🔧 Enable/disable type"),
            ("", "", "q", "👋 Quit")
        ]

        for row in options:
            menu_table.add_row(*row)

        console.print(Panel(menu_table, title="📋 Menu", border_style="yellow"))

        choice = prompt_with_autocomplete(
            "\nChoose an option",
            completer=WordCompleter([str(i) for i in range(1, 11)] + ["q", "quit", "exit"])
        ).strip()

        if choice == "1":
            product_type = prompt_with_autocomplete("Filter by type (blank for all)", completer=get_type_completer())
            products, total = shop.available_products(product_type.strip())
            show_products(products, title="📦 Available", total=total)

        elif choice == "2":
            pid = prompt_with_autocomplete("Enter product ID", completer=get_product_completer())
            product_id = try_store(ProductID.from_hex, pid)
            if product_id is not None:
                product = shop.product(product_id)
                if product is None:
                    console.print(show_status(f"Product {pid} not found", False))
                else:
                    show_product_detail(product)

        elif choice == "3":
            product = ask_new_product()
            ids = try_store(shop.add_products, product, success_msg=f"Product '{product.name}' added")
            if ids:
                console.print(Panel(f"Added product: [green]{ids[0]}[/green]"))

        elif choice == "4":
            raw = prompt_with_autocomplete("Product IDs to sell (space separated)", completer=get_product_completer())
            product_ids = try_store(_parse_product_ids, raw)
            if product_ids is None:
                continue
            buyer = Prompt.ask("Buyer name")
            address = Prompt.ask("Shipping address")
            amount = ask_float(f"Amount paid in {settings.CURRENCY}", default=0.0)
            order = try_store(
                shop.sell_products,
                OrderIn(name=buyer, shipping_address=address, amount_paid=amount, product_ids=product_ids),
                success_msg=f"Order placed for {buyer}",
            )
            if order:
                console.print(Panel.fit(
                    f"[green]Order placed successfully![/green]\n"
                    f"Order ID: [bold]{order.id}[/bold]\n"
                    f"Total: [bold]{_money(order.total)}[/bold]\n"
                    f"Paid: [bold]{_money(order.amount_paid)}[/bold]",
                    title="✅ Order Confirmation"
                ))

        elif choice == "5":
            product_type = prompt_with_autocomplete("Filter by type (blank for all)", completer=get_type_completer())
            products, total = shop.sold_products(product_type.strip())
            show_products(products, title="🧾 Sold", total=total)

        elif choice == "6":
            orders, total_paid = shop.orders()
            show_orders(orders, total_paid)

        elif choice == "7":
            product_type = prompt_with_autocomplete("Product type", completer=get_type_completer())
            in_stock = shop.in_stock(product_type.strip())
            console.print(show_status(f"{product_type} in stock: {in_stock}", in_stock))

        elif choice == "8":
            raw = prompt_with_autocomplete("Product IDs to delete (space separated)", completer=get_product_completer())
            product_ids = try_store(_parse_product_ids, raw)
            if product_ids is not None and Confirm.ask(f"[red]Delete {len(product_ids)} product(s)?[/red]"):
                deleted = try_store(shop.delete_products, *product_ids)
                if deleted is not None:
                    console.print(show_status(f"Deleted {deleted} product(s)"))

        elif choice == "9":
            show_supported(shop.all_supported_products())

        elif choice == "10":
            product_type = prompt_with_autocomplete("Product type", completer=get_type_completer()).strip()
            enabled = Confirm.ask(f"Support {product_type}?")
            try_store(
                shop.update_products_supported, product_type, enabled,
                success_msg=f"Support for {product_type} set to {enabled}",
            )

        elif choice.lower() in ("q", "quit", "exit"):
            if Confirm.ask("Are you sure you want to quit?"):
                console.print(Panel.fit("[bold green]Goodbye 👋[/bold green]", title=shop.name))
                sys.exit(0)

        console.print()
        console.rule(style="dim")


def main():
    setup_logging(settings.LOG_LEVEL)
    try_store(shop.add_products, *sample_products())
    try:
        menu()
    except KeyboardInterrupt:
        console.print("\n\n[bold red]Interrupted by user[/bold red]")
        sys.exit(1)


if __name__ == "__main__":
    main()
