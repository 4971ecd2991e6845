"""Main CLI application"""

import json
import logging
from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from lease_contracts.models import (
    Clause,
    ClauseCategory,
    ContractRequest,
    ContractTemplate,
    LandlordProfile,
    PersonData,
    PropertyData,
    PropertyProfile,
)
from lease_contracts.utils.config import get_settings
from lease_contracts.utils.i18n import get_translator

app = typer.Typer(
    name="lease-contracts",
    help="Residential lease contract generator",
    add_completion=False,
)

console = Console()


@app.callback()
def main():
    """Configure logging from settings"""
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _storage():
    from lease_contracts.services.storage import StorageService
    return StorageService()


def _contract_service():
    from lease_contracts.services.contract import ContractService
    return ContractService(_storage())


def _fail(message: str):
    console.print(f"[red]Error: {message}[/red]")
    raise typer.Exit(code=1)


def _load_json(path: str) -> dict:
    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        _fail(f"Cannot read {path}: {e}")
    if not isinstance(raw, dict):
        _fail(f"Expected a JSON object in {path}")
    return raw


def _report_delete(kind: str, record_id: str, deleted: bool):
    if not deleted:
        _fail(f"{kind} not found: {record_id}")
    console.print(f"[green][OK] {kind} deleted: {record_id}[/green]")


@app.command("init")
def init(
    seed: bool = typer.Option(True, "--seed/--no-seed", help="Store default clauses and templates"),
):
    """Initialize the database"""
    from lease_contracts.services.default_clauses import default_clauses, default_template

    storage = _storage()
    storage.store.init_db()
    console.print("[green][OK] Database initialized[/green]")

    if not seed:
        return

    # Existing clauses and templates are never overwritten
    if not storage.has_stored_clauses():
        storage.save_clauses(default_clauses())
        console.print("[green][OK] Default clauses stored[/green]")

    for template in (default_template(), default_template(has_guarantor=True)):
        if storage.get_template(template.id) is None:
            storage.save_template(template)
            console.print(f"[green][OK] Default template stored: {template.id}[/green]")


@app.command("clauses")
def clauses():
    """List the clause catalog"""
    t = get_translator(get_settings().contract_language)

    table = Table(title=t("clauses"))
    table.add_column("ID", style="cyan")
    table.add_column("Title", style="green")
    table.add_column("Category")
    table.add_column("Content")

    for clause in _storage().get_clauses():
        content = clause.content[:60] + "..." if len(clause.content) > 60 else clause.content
        table.add_row(clause.id, clause.title, t(clause.category.value), content)

    console.print(table)


@app.command("clause-add")
def clause_add(
    title: str = typer.Argument(..., help="Clause title, for management only"),
    content: str = typer.Option(..., "--content", "-c", help="Clause text with {TOKEN} placeholders"),
    category: ClauseCategory = typer.Option(ClauseCategory.OPTIONAL, "--category", help="obligatory or optional"),
):
    """Add a clause to the catalog"""
    clause = Clause(title=title, content=content, category=category)
    _storage().add_clause(clause)
    console.print(f"[green][OK] Clause saved: {clause.id}[/green]")


@app.command("clause-edit")
def clause_edit(
    clause_id: str = typer.Argument(..., help="Clause id"),
    title: str = typer.Option(None, "--title", "-t", help="New title"),
    content: str = typer.Option(None, "--content", "-c", help="New clause text"),
    category: ClauseCategory = typer.Option(None, "--category", help="obligatory or optional"),
):
    """Edit a clause in place, keeping its id and position"""
    storage = _storage()
    clause = next((c for c in storage.get_clauses() if c.id == clause_id), None)
    if not clause:
        _fail(f"Clause not found: {clause_id}")

    changes = {"title": title, "content": content, "category": category}
    updated = clause.model_copy(update={k: v for k, v in changes.items() if v is not None})
    storage.update_clause(clause_id, updated)
    console.print(f"[green][OK] Clause updated: {clause_id}[/green]")


@app.command("clause-delete")
def clause_delete(
    clause_id: str = typer.Argument(..., help="Clause id"),
):
    """Remove a clause from the catalog"""
    _report_delete("Clause", clause_id, _storage().delete_clause(clause_id))


@app.command("templates")
def templates():
    """List contract templates"""
    template_list = _storage().get_templates()
    if not template_list:
        console.print("[yellow]No templates available[/yellow]")
        console.print("Use [cyan]python -m lease_contracts init[/cyan] to store the defaults")
        return

    table = Table(title="Contract Templates")
    table.add_column("ID", style="cyan")
    table.add_column("Name", style="green")
    table.add_column("Clauses", justify="right")
    table.add_column("Guarantor")

    for template in template_list:
        table.add_row(
            template.id,
            template.name,
            str(len(template.clause_ids)),
            "Yes" if template.has_guarantor else "No",
        )

    console.print(table)


@app.command("template-add")
def template_add(
    name: str = typer.Argument(..., help="Template name"),
    clause_ids: str = typer.Option(..., "--clauses", "-c", help="Comma-separated clause ids, in order"),
    guarantor: bool = typer.Option(False, "--guarantor", "-g", help="Template expects a guarantor"),
):
    """Create a template from an ordered list of clause ids"""
    ids = [c.strip() for c in clause_ids.split(",") if c.strip()]
    known = {c.id for c in _storage().get_clauses()}
    unknown = [c for c in ids if c not in known]
    if unknown:
        console.print(f"[yellow]Unknown clause ids will be skipped: {', '.join(unknown)}[/yellow]")

    template = ContractTemplate(name=name, clause_ids=ids, has_guarantor=guarantor)
    _storage().save_template(template)
    console.print(f"[green][OK] Template saved: {template.id}[/green]")


@app.command("template-delete")
def template_delete(
    template_id: str = typer.Argument(..., help="Template id"),
):
    """Delete a template"""
    _report_delete("Template", template_id, _storage().delete_template(template_id))


@app.command("landlords")
def landlords():
    """List saved landlords"""
    t = get_translator(get_settings().contract_language)
    profiles = _storage().get_landlords()
    if not profiles:
        console.print(f"[yellow]{t('no_records')}[/yellow]")
        return

    table = Table(title=t("landlord"))
    table.add_column("ID", style="cyan")
    table.add_column("Name", style="green")
    table.add_column("CPF")
    for profile in profiles:
        table.add_row(profile.id, profile.data.name, profile.data.cpf)
    console.print(table)


@app.command("landlord-add")
def landlord_add(
    data: str = typer.Argument(..., help="Path to a JSON file with the landlord's data"),
):
    """Save a landlord profile"""
    try:
        profile = LandlordProfile(data=PersonData(**_load_json(data)))
    except ValidationError as e:
        _fail(str(e))
    _storage().save_landlord(profile)
    console.print(f"[green][OK] Landlord saved: {profile.id}[/green]")


@app.command("landlord-delete")
def landlord_delete(
    landlord_id: str = typer.Argument(..., help="Landlord id"),
):
    """Delete a landlord profile"""
    _report_delete("Landlord", landlord_id, _storage().delete_landlord(landlord_id))


@app.command("properties")
def properties():
    """List saved properties"""
    t = get_translator(get_settings().contract_language)
    profiles = _storage().get_properties()
    if not profiles:
        console.print(f"[yellow]{t('no_records')}[/yellow]")
        return

    table = Table(title=t("property"))
    table.add_column("ID", style="cyan")
    table.add_column("Description", style="green")
    table.add_column("Address")
    for profile in profiles:
        p = profile.data
        table.add_row(profile.id, p.description, f"{p.street}, {p.number} - {p.neighborhood}")
    console.print(table)


@app.command("property-add")
def property_add(
    data: str = typer.Argument(..., help="Path to a JSON file with the property's data"),
):
    """Save a property profile"""
    try:
        profile = PropertyProfile(data=PropertyData(**_load_json(data)))
    except ValidationError as e:
        _fail(str(e))
    _storage().save_property(profile)
    console.print(f"[green][OK] Property saved: {profile.id}[/green]")


@app.command("property-delete")
def property_delete(
    property_id: str = typer.Argument(..., help="Property id"),
):
    """Delete a property profile"""
    _report_delete("Property", property_id, _storage().delete_property(property_id))


def _load_request(path: str) -> ContractRequest:
    try:
        return ContractRequest(**_load_json(path))
    except ValidationError as e:
        _fail(str(e))


@app.command("preview")
def preview(
    request: str = typer.Argument(..., help="Path to a JSON contract request"),
):
    """Render a contract without saving it"""
    service = _contract_service()
    try:
        context = service.build_context(_load_request(request))
    except ValueError as e:
        _fail(str(e))

    console.print(Panel(Text(service.preview(context)), title="Preview", border_style="blue"))


@app.command("generate")
def generate(
    request: str = typer.Argument(..., help="Path to a JSON contract request"),
    output: str = typer.Option(None, "--pdf", "-o", help="Also export a PDF to this path"),
):
    """Generate and save a contract"""
    service = _contract_service()
    try:
        contract = service.generate(service.build_context(_load_request(request)))
    except ValueError as e:
        _fail(str(e))

    console.print(f"[green][OK] Contract generated: {contract.id}[/green]")
    if output:
        _export(service, contract, output)


@app.command("contracts")
def contracts():
    """List generated contracts"""
    t = get_translator(get_settings().contract_language)
    items = _storage().get_generated_contracts()
    if not items:
        console.print(f"[yellow]{t('no_records')}[/yellow]")
        return

    table = Table(title="Generated Contracts")
    table.add_column("ID", style="cyan")
    table.add_column(t("tenant"), style="green")
    table.add_column(t("property"))
    table.add_column(t("generated_at"))
    for contract in items:
        table.add_row(
            contract.id,
            contract.tenant.name,
            contract.property.description,
            contract.generated_at.strftime("%d/%m/%Y %H:%M"),
        )
    console.print(table)


@app.command("contract-delete")
def contract_delete(
    contract_id: str = typer.Argument(..., help="Generated contract id"),
):
    """Delete a generated contract"""
    _report_delete("Contract", contract_id, _storage().delete_generated_contract(contract_id))


def _get_contract(service, contract_id: str):
    contract = service.storage.get_generated_contract(contract_id)
    if not contract:
        _fail(f"Contract not found: {contract_id}")
    return contract


@app.command("show")
def show(
    contract_id: str = typer.Argument(..., help="Generated contract id"),
):
    """Show a generated contract"""
    service = _contract_service()
    contract = _get_contract(service, contract_id)
    console.print(Panel(Text(service.render(contract)), title=contract.id, border_style="blue"))


def _export(service, contract, output: str):
    from lease_contracts.services.pdf_generator import export_contract_pdf

    landlord = service.storage.get_landlord(contract.landlord_id)
    path = export_contract_pdf(
        service.render(contract),
        output,
        contract=contract,
        landlord=landlord.data if landlord else None,
    )
    console.print(f"[green][OK] PDF exported: {path}[/green]")


@app.command("export-pdf")
def export_pdf(
    contract_id: str = typer.Argument(..., help="Generated contract id"),
    output: str = typer.Option(None, "--output", "-o", help="Output file path"),
):
    """Export a generated contract to PDF"""
    service = _contract_service()
    contract = _get_contract(service, contract_id)
    output = output or str(Path(get_settings().output_dir) / f"contrato_{contract.id}.pdf")
    _export(service, contract, output)


@app.command("backup")
def backup(
    output: str = typer.Option(None, "--output", "-o", help="Backup file path"),
):
    """Export every record to a JSON backup"""
    from lease_contracts.services.backup import write_backup

    path = write_backup(_storage(), output)
    console.print(f"[green][OK] Backup written: {path}[/green]")


@app.command("restore")
def restore(
    path: str = typer.Argument(..., help="Backup file to import"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
):
    """Import a JSON backup, overwriting records with the same ids"""
    from lease_contracts.services.backup import import_data, read_backup

    try:
        data = read_backup(path)
    except (OSError, ValueError) as e:
        _fail(str(e))

    if not yes and not typer.confirm("Records with the same ids will be overwritten. Continue?"):
        console.print("[yellow]Import cancelled[/yellow]")
        return

    import_data(_storage(), data)
    console.print("[green][OK] Backup imported[/green]")
