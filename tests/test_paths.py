from spa_service_generator.generator.paths import derive_module_path
from spa_service_generator.naming import dash_case


class TestDashCase:
    def test_pascal_case(self):
        assert dash_case("OrderLines") == "order-lines"

    def test_acronym(self):
        assert dash_case("APIKeys") == "api-keys"

    def test_digits(self):
        assert dash_case("V2Items") == "v2-items"

    def test_single_word(self):
        assert dash_case("Orders") == "orders"


class TestDeriveModulePath:
    def test_multiple_frontends_nested_folders(self):
        module = derive_module_path(
            "Kinetix.CustomerOrders.FrontEnd",
            ["Controllers", "Admin", "Orders"],
            "OrdersController",
            multiple_frontends=True,
        )
        assert module.path == "customer-orders/admin/orders/orders.ts"
        assert module.folder_count == 3

    def test_two_frontends_one_subfolder(self):
        module = derive_module_path("Kinetix.Orders.FrontEnd", ["Controllers", "Admin"], "OrdersController", True)
        assert module.path == "orders/admin/orders.ts"
        assert module.folder_count == 2

    def test_single_frontend_drops_project_segment(self):
        module = derive_module_path("Kinetix.Orders.FrontEnd", ["Controllers"], "OrderLinesController", False)
        assert module.path == "order-lines.ts"
        assert module.folder_count == 0

    def test_controller_at_project_root(self):
        module = derive_module_path("Kinetix.Orders.FrontEnd", [], "HomeController", False)
        assert module.path == "home.ts"
        assert module.folder_count == 0

    def test_project_without_dots(self):
        module = derive_module_path("WebFrontEnd", ["Controllers"], "HomeController", True)
        assert module.path == "web-front-end/home.ts"

    def test_custom_extension(self):
        module = derive_module_path("Kinetix.Orders.FrontEnd", ["Controllers"], "OrdersController", False, ".js")
        assert module.path == "orders.js"
