"""图表工厂测试"""
from components.charts import (
    create_balance_bar,
    create_balance_comparison_line,
    create_principal_interest_line,
)
from core.calculator import generate_chart_data, sample_chart_data
from core.schedule_generator import generate_schedule


def _points(start_date, years=30):
    return generate_chart_data(generate_schedule(400000, 6.5, years, start_date=start_date))


class TestPeriodAxis:
    def test_every_payment_has_own_x(self, start_date):
        """逐期数据点按期数取值，同一年内的点不会叠在一起"""
        points = _points(start_date)
        fig = create_principal_interest_line(points)
        x = list(fig.data[0].x)
        assert x == list(range(1, 361))
        assert len(set(x)) == len(x)

    def test_sampled_last_period_kept_distinct(self, start_date):
        points = sample_chart_data(_points(start_date), 12)
        fig = create_balance_bar(points)
        x = list(fig.data[0].x)
        assert x[-2:] == [349, 360]
        assert len(set(x)) == len(x)

    def test_year_tick_labels(self, start_date):
        fig = create_principal_interest_line(_points(start_date, years=10))
        axis = fig.layout.xaxis
        assert list(axis.tickvals) == [12 * y for y in range(1, 11)]
        assert axis.ticktext[0] == "Year 1"
        assert axis.ticktext[-1] == "Year 10"

    def test_long_term_ticks_thinned(self, start_date):
        fig = create_balance_bar(sample_chart_data(_points(start_date), 6))
        ticktext = list(fig.layout.xaxis.ticktext)
        assert ticktext[0] == "Year 2"
        assert ticktext[-1] == "Year 30"
        assert len(ticktext) == 15

    def test_comparison_axis_covers_longest_series(self, start_date):
        short = _points(start_date, years=15)
        long = _points(start_date, years=30)
        fig = create_balance_comparison_line({"Short": short, "Long": long})
        assert fig.layout.xaxis.ticktext[-1] == "Year 30"
        assert list(fig.data[0].x) == list(range(1, 181))
