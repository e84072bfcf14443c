"""Tests for the command-line interface."""

import csv
import json

from teller_staffing.scripts import run_staffing
from teller_staffing.scripts.run_staffing import main


class TestCommandLine:

    def test_report_printed(self, capsys):
        assert main(['--max-tellers', '3', '--window', '1800']) == 0

        out = capsys.readouterr().out
        assert 'SIMULATION WITH 1 TELLER(S):' in out
        assert 'SIMULATION WITH 3 TELLER(S):' in out
        assert 'Maximum Wait:' in out
        assert '***' in out

    def test_recommendation_from_config_file(self, tmp_path, capsys):
        path = tmp_path / 'steady.json'
        path.write_text(json.dumps({
            'min_interarrival': 10, 'max_interarrival': 10,
            'min_service': 60, 'max_service': 60,
            'max_wait_allowed': 0, 'window_seconds': 1000, 'max_tellers': 8
        }))

        assert main(['--config', str(path)]) == 0

        out = capsys.readouterr().out
        assert 'RECOMMENDATION: 6 teller(s)' in out

    def test_no_recommendation(self, capsys):
        assert main(['--max-tellers', '1', '--max-wait', '0']) == 0

        assert 'No teller count in 1..1 meets the goal' in capsys.readouterr().out

    def test_quiet(self, capsys):
        assert main(['-q', '--max-tellers', '2']) == 0

        assert capsys.readouterr().out == ''

    def test_json_and_csv_output(self, tmp_path):
        output = tmp_path / 'results.json'
        table = tmp_path / 'results.csv'

        assert main(['-q', '--max-tellers', '4', '-r', '2',
                     '-o', str(output), '--csv', str(table)]) == 0

        data = json.loads(output.read_text())
        assert data['config']['max_tellers'] == 4
        assert len(data['search']['results']) == 4
        assert data['replications']['replications'] == 2

        with open(table) as f:
            rows = list(csv.DictReader(f))
        assert [row['teller_count'] for row in rows] == ['1', '2', '3', '4']

    def test_detailed(self, capsys):
        assert main(['-d', '--max-tellers', '2', '--window', '300']) == 0

        out = capsys.readouterr().out
        assert 'Customers with' in out
        assert 'wait' in out

    def test_plot_files(self, tmp_path):
        plot = tmp_path / 'staffing.png'
        timeline = tmp_path / 'timeline.png'

        assert main(['-q', '--max-tellers', '3', '--window', '900',
                     '--plot-file', str(plot), '--timeline-file', str(timeline)]) == 0

        assert plot.exists()
        assert timeline.exists()

    def test_invalid_configuration(self, capsys):
        assert main(['--min-tellers', '5', '--max-tellers', '2']) == 1

        assert capsys.readouterr().out.startswith('Error:')

    def test_missing_config_file(self, tmp_path, capsys):
        assert main(['--config', str(tmp_path / 'missing.json')]) == 1

        assert 'Error:' in capsys.readouterr().out

    def test_unwritable_json_output(self, tmp_path, capsys):
        """Export failures are reported like any other error."""
        target = tmp_path / 'missing' / 'out.json'

        assert main(['-q', '--max-tellers', '2', '-o', str(target)]) == 1

        assert capsys.readouterr().out.startswith('Error:')

    def test_unwritable_csv_output(self, tmp_path, capsys):
        target = tmp_path / 'missing' / 'out.csv'

        assert main(['-q', '--max-tellers', '2', '--csv', str(target)]) == 1

        assert 'Error:' in capsys.readouterr().out

    def test_unwritable_plot_file(self, tmp_path, capsys):
        target = tmp_path / 'missing' / 'plot.png'

        assert main(['-q', '--max-tellers', '2', '--window', '600',
                     '--plot-file', str(target)]) == 1

        assert 'Error:' in capsys.readouterr().out

    def test_replications_reuse_first_search(self, monkeypatch, tmp_path):
        """The main search counts as replication 0 and is not repeated."""
        calls = []
        original = run_staffing.replicate_search

        def recording(config, replications, base_seed, **kwargs):
            calls.append((replications, base_seed))
            return original(config, replications, base_seed, **kwargs)

        monkeypatch.setattr(run_staffing, 'replicate_search', recording)
        output = tmp_path / 'results.json'

        assert main(['-q', '-s', '7', '-r', '3', '--max-tellers', '3',
                     '-o', str(output)]) == 0

        assert calls == [(2, 8)]
        data = json.loads(output.read_text())
        assert data['replications']['replications'] == 3
