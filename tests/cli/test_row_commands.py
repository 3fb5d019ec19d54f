"""Tests for row management CLI commands."""


class TestAddCommand:
    """Test the add command."""

    def test_add_creates_file(self, cli_runner, record_file):
        """Adding a row writes it to the keyed file."""
        result = cli_runner.invoke(["add", "fruits-list", "apple"])

        assert result.exit_code == 0
        assert "Row added successfully" in result.output
        assert record_file.read_text() == "apple\n"

    def test_add_duplicate_fails(self, cli_runner):
        """Adding a duplicate exits 1."""
        cli_runner.invoke(["add", "fruits-list", "apple"])

        result = cli_runner.invoke(["add", "fruits-list", "APPLE"])

        assert result.exit_code == 1
        assert "Failed to add the row" in result.output
        assert "already exists" in result.output

    def test_add_blank_fails(self, cli_runner, record_file):
        """Blank rows are rejected."""
        result = cli_runner.invoke(["add", "fruits-list", "   "])

        assert result.exit_code == 1
        assert not record_file.exists()

    def test_add_unencodable_fails(self, cli_runner, record_file):
        """Rows that cannot be stored as UTF-8 fail without creating a file."""
        result = cli_runner.invoke(["add", "fruits-list", "bad\udcff"])

        assert result.exit_code == 1
        assert "Failed to add the row" in result.output
        assert not record_file.exists()

    def test_invalid_key(self, cli_runner):
        """Keys ending in a delimiter are a usage error."""
        result = cli_runner.invoke(["add", "fruits-", "apple"])

        assert result.exit_code == 2
        assert "Invalid key" in result.output


class TestGetCommand:
    """Test the paginated get command."""

    def test_get_sorted_page(self, cli_runner):
        """Rows print in sorted order with the total."""
        for row in ("banana", "apple", "cherry"):
            cli_runner.invoke(["add", "fruits-list", row])

        result = cli_runner.invoke(["get", "fruits-list", "1", "--quantity", "2"])

        assert result.exit_code == 0
        assert "Total rows: 3" in result.output
        assert "apple" in result.output
        assert "banana" in result.output
        assert "cherry" not in result.output
        assert result.output.index("apple") < result.output.index("banana")

    def test_get_descending(self, cli_runner):
        """--desc reverses the order."""
        for row in ("banana", "apple", "cherry"):
            cli_runner.invoke(["add", "fruits-list", row])

        result = cli_runner.invoke(["get", "fruits-list", "--desc", "-n", "1"])

        assert result.exit_code == 0
        assert "cherry" in result.output
        assert "apple" not in result.output

    def test_get_missing_file(self, cli_runner):
        """A missing file shows zero rows."""
        result = cli_runner.invoke(["get", "fruits-list"])

        assert result.exit_code == 0
        assert "Total rows: 0" in result.output

    def test_get_rejects_zero_page(self, cli_runner):
        """Page numbers start at 1."""
        result = cli_runner.invoke(["get", "fruits-list", "0"])

        assert result.exit_code == 2

    def test_get_prints_markup_literally(self, cli_runner):
        """Rows containing rich markup are shown verbatim."""
        cli_runner.invoke(["add", "fruits-list", "[bold]apple[/bold]"])

        result = cli_runner.invoke(["get", "fruits-list"])

        assert "[bold]apple[/bold]" in result.output


class TestGetIndexCommand:
    """Test the get-index command."""

    def test_get_index(self, cli_runner):
        """The row at the position is printed."""
        cli_runner.invoke(["add", "fruits-list", "banana"])
        cli_runner.invoke(["add", "fruits-list", "apple"])

        result = cli_runner.invoke(["get-index", "fruits-list", "2"])

        assert result.exit_code == 0
        assert "Row 2: apple" in result.output

    def test_get_index_missing(self, cli_runner):
        """A missing position exits 1."""
        result = cli_runner.invoke(["get-index", "fruits-list", "1"])

        assert result.exit_code == 1
        assert "No row found at index 1" in result.output


class TestCountCommand:
    """Test the count command."""

    def test_count(self, cli_runner):
        """count prints the number of rows."""
        cli_runner.invoke(["add", "fruits-list", "a"])
        cli_runner.invoke(["add", "fruits-list", "b"])

        result = cli_runner.invoke(["count", "fruits-list"])

        assert result.exit_code == 0
        assert "Total rows: 2" in result.output


class TestDeleteCommands:
    """Test delete-by-term and delete-by-index."""

    def test_delete_by_term(self, cli_runner, record_file):
        """Only the first matching row is removed."""
        for row in ("green apple", "banana", "red apple"):
            cli_runner.invoke(["add", "fruits-list", row])

        result = cli_runner.invoke(["delete-by-term", "fruits-list", "apple"])

        assert result.exit_code == 0
        assert "Row deleted successfully" in result.output
        assert record_file.read_text() == "banana\nred apple\n"

    def test_delete_by_term_all(self, cli_runner, record_file):
        """--all removes every matching row."""
        for row in ("green apple", "banana", "red apple"):
            cli_runner.invoke(["add", "fruits-list", row])

        result = cli_runner.invoke(["delete-by-term", "fruits-list", "apple", "--all"])

        assert result.exit_code == 0
        assert "2 row(s) deleted" in result.output
        assert record_file.read_text() == "banana\n"

    def test_delete_by_term_no_match(self, cli_runner):
        """No match exits 1."""
        result = cli_runner.invoke(["delete-by-term", "fruits-list", "x"])

        assert result.exit_code == 1
        assert "No rows found to delete" in result.output

    def test_delete_by_index(self, cli_runner, record_file):
        """The row at the position is removed."""
        cli_runner.invoke(["add", "fruits-list", "a"])
        cli_runner.invoke(["add", "fruits-list", "b"])

        result = cli_runner.invoke(["delete-by-index", "fruits-list", "1"])

        assert result.exit_code == 0
        assert "Row 1 deleted successfully" in result.output
        assert record_file.read_text() == "b\n"

    def test_delete_by_index_out_of_range(self, cli_runner):
        """Out-of-range positions exit 1."""
        cli_runner.invoke(["add", "fruits-list", "a"])

        result = cli_runner.invoke(["delete-by-index", "fruits-list", "5"])

        assert result.exit_code == 1
        assert "Could not delete row 5" in result.output


class TestUpdateCommands:
    """Test update-by-index and update-by-term."""

    def test_update_by_index(self, cli_runner, record_file):
        """The row at the position is replaced."""
        cli_runner.invoke(["add", "fruits-list", "a"])

        result = cli_runner.invoke(["update-by-index", "fruits-list", "1", "z"])

        assert result.exit_code == 0
        assert "Row 1 updated successfully" in result.output
        assert record_file.read_text() == "z\n"

    def test_update_by_index_missing(self, cli_runner):
        """Updating a missing file exits 1."""
        result = cli_runner.invoke(["update-by-index", "fruits-list", "1", "z"])

        assert result.exit_code == 1
        assert "Could not update row 1" in result.output

    def test_update_by_term(self, cli_runner, record_file):
        """The first matching row is replaced."""
        cli_runner.invoke(["add", "fruits-list", "apple"])
        cli_runner.invoke(["add", "fruits-list", "banana"])

        result = cli_runner.invoke(["update-by-term", "fruits-list", "app", "apricot"])

        assert result.exit_code == 0
        assert record_file.read_text() == "apricot\nbanana\n"

    def test_update_by_term_no_match(self, cli_runner):
        """No match exits 1."""
        cli_runner.invoke(["add", "fruits-list", "apple"])

        result = cli_runner.invoke(["update-by-term", "fruits-list", "kiwi", "x"])

        assert result.exit_code == 1
        assert "No row found to update" in result.output
