import pytest

from spa_service_generator.errors import SolutionLoadError
from spa_service_generator.frontend.base import TypeRef
from spa_service_generator.frontend.solution import load_sln, parse_sln, read_assembly_name
from spa_service_generator.generator.driver import ServiceGenerator

from conftest import FIXTURES

SAMPLE = FIXTURES / "Sample"


class TestParseSln:
    def test_projects_only(self):
        entries = parse_sln((SAMPLE / "Sample.sln").read_text(encoding="utf-8"))
        assert entries == [
            ("Sample.Web.FrontEnd", "Sample.Web.FrontEnd/Sample.Web.FrontEnd.csproj"),
            ("Sample.Contract", "Sample.Contract/Sample.Contract.csproj"),
        ]

    def test_assembly_name_defaults_to_project_name(self):
        assert read_assembly_name(SAMPLE / "Sample.Contract" / "Sample.Contract.csproj", "Sample.Contract") == "Sample.Contract"

    def test_missing_project_file(self, tmp_path):
        with pytest.raises(SolutionLoadError):
            read_assembly_name(tmp_path / "Missing.csproj", "Missing")


class TestLoadSln:
    def test_documents_and_folders(self):
        solution = load_sln(SAMPLE / "Sample.sln")
        frontend = solution.frontends("Sample")[0]
        documents = {d.name: d.folders for d in frontend.documents}
        assert documents == {
            "OrdersController.cs": ["Controllers"],
            "StatusController.cs": ["Controllers", "Admin"],
        }

    def test_declared_types_are_resolved(self):
        solution = load_sln(SAMPLE / "Sample.sln")
        assert solution.resolve_type(TypeRef(name="OrderStatus")).namespace == "Sample.Orders"

    def test_empty_solution(self, tmp_path):
        sln = tmp_path / "Empty.sln"
        sln.write_text("Microsoft Visual Studio Solution File, Format Version 12.00\n")
        with pytest.raises(SolutionLoadError):
            load_sln(sln)

    def test_generate_from_sources(self, tmp_path):
        solution = load_sln(SAMPLE / "Sample.sln")
        report = ServiceGenerator(solution, tmp_path, "Sample").generate()

        assert report.ok
        assert sorted(report.written) == ["admin/status.ts", "orders.ts"]

        orders = (tmp_path / "app" / "services" / "orders.ts").read_text(encoding="utf-8")
        assert " * Gets an order by its OrderDto id." in orders
        assert "export function GetOrder(id: number, status?: string, options: RequestInit = {}): Promise<OrderDto>" in orders
        assert "export function SaveOrder(order: OrderDto, options: RequestInit = {}): Promise<OrderDto[]>" in orders
        assert "Home" not in orders
        assert 'import { OrderDto } from "../model/orders";' in orders

        status = (tmp_path / "app" / "services" / "admin" / "status.ts").read_text(encoding="utf-8")
        assert "Promise<OrderStatus[]>" in status
        assert "export function Ping(" in status
        assert "Dispose" not in status
