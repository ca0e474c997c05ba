import pytest

from SFG.errors import DefinitionError, FileError, RangeError
from SFG.SDM.distribution import DistributionRecord, DistributionTable, load_distributions


class TestDistributionParsing:
    def test_defaults(self, table_factory):
        table = table_factory("5 $ ramp")
        rec = table[0]
        assert (rec.first, rec.last, rec.step) == (5, 5, 1)
        assert rec.values == (1, 2, 3, 4)

    def test_explicit_range_and_step(self, table_factory):
        rec = table_factory("1,9,4 $ ramp")[0]
        assert (rec.first, rec.last, rec.step) == (1, 9, 4)
        assert list(rec.cell_indices()) == [0, 4, 8]

    def test_fragments_concatenated_in_order(self, table_factory):
        rec = table_factory("1 $ ramp, polyA")[0]
        assert rec.values == (1, 2, 3, 4, "A", "A", "A", "A")

    def test_comma_after_dollar(self, table_factory):
        rec = table_factory("2,3 $, ramp")[0]
        assert rec.values == (1, 2, 3, 4)

    def test_scaled_cell_numbers(self, table_factory):
        rec = table_factory("1, 2K, 0x2 $ ramp")[0]
        assert rec.last == 2048
        assert rec.step == 2

    def test_file_order_kept(self, table_factory):
        table = table_factory("# header\n1 $ ramp\n\n2 $ polyA\n// tail\n")
        assert [r.first for r in table] == [1, 2]
        assert len(table) == 2

    def test_undefined_fragment(self, table_factory):
        with pytest.raises(DefinitionError, match="Undefined fragment name 'nope'"):
            table_factory("1 $ ramp, nope")

    def test_nucleotide_is_not_a_fragment(self, table_factory):
        with pytest.raises(DefinitionError):
            table_factory("1 $ A")

    def test_missing_dollar(self, table_factory):
        with pytest.raises(DefinitionError, match="Missing"):
            table_factory("1,2,3 ramp")

    @pytest.mark.parametrize("line", ["0 $ ramp", "2049 $ ramp", "$ ramp"])
    def test_first_cell_out_of_range(self, table_factory, line):
        with pytest.raises(RangeError, match="Invalid cell number"):
            table_factory(line)

    @pytest.mark.parametrize("line", ["5,4 $ ramp", "1,2049 $ ramp"])
    def test_bad_range(self, table_factory, line):
        with pytest.raises(RangeError, match="Invalid cell range"):
            table_factory(line)

    def test_extra_field_before_dollar(self, table_factory):
        with pytest.raises(DefinitionError, match="Unexpected text"):
            table_factory("1,2,1,9 $ ramp")

    def test_first_cell_checked_against_frame_size(self, table_factory):
        assert table_factory("4096 $ ramp", cells_per_frame=4096)[0].first == 4096
        with pytest.raises(RangeError):
            table_factory("4097 $ ramp", cells_per_frame=4096)

    def test_load_from_file(self, tmp_path, store):
        path = tmp_path / "d.def"
        path.write_text("1,3 $ ramp\n")
        table = load_distributions(path, store, 2048)
        assert table[0].label() == "1,3,1"
        assert table.store is store

    def test_missing_file(self, tmp_path, store):
        with pytest.raises(FileError):
            load_distributions(tmp_path / "missing.def", store, 2048)


class TestDistributionTable:
    def test_longest_sequence(self, table_factory):
        table = table_factory("1 $ ramp\n2 $ ramp, mixed\n3 $ polyA")
        assert table.longest_sequence == 10

    def test_empty_table(self):
        assert DistributionTable().longest_sequence == 0

    def test_records_are_immutable(self):
        table = DistributionTable([DistributionRecord(1, 1, 1, (1,))])
        with pytest.raises(AttributeError):
            table[0].first = 2
        assert isinstance(table.records, tuple)
