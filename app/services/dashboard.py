"""
Sales analytics behind ``/main/dashboard``.

The view only depends on the dict shape returned by ``MetricsSource.snapshot``.
``RandomMetricsSource`` is the placeholder generator the dashboard shipped
with; ``OrderHistoryMetricsSource`` aggregates real orders with pandas.
"""
import random
from datetime import date, timedelta
import pandas as pd
from models.order import Order

TREND_DAYS = 7
TOP_SELLING = 5


class MetricsSource:
    def snapshot(self, shopkeeper) -> dict:
        raise NotImplementedError


def _trend_days(today):
    return [today - timedelta(days=TREND_DAYS - 1 - i) for i in range(TREND_DAYS)]


def _day_label(d) -> str:
    return f"{d:%b} {d.day}"


def _month_label(year, month) -> str:
    return f"{date(year, month, 1):%b} {year}"


class RandomMetricsSource(MetricsSource):
    """Synthetic numbers; a fixed seed makes every snapshot identical."""

    def __init__(self, seed=None, today=None):
        self.seed = seed
        self.today = today

    def snapshot(self, shopkeeper) -> dict:
        rng = random.Random(self.seed) if self.seed is not None else random.Random()
        today = self.today or date.today()
        stats = {
            "total_sales_amount": rng.randint(100000, 199999),
            "total_transactions": rng.randint(10, 50),
            "total_stock": rng.randint(500, 999),
            "unique_customers": rng.randint(5, 30),
        }
        sales_trend = [
            {"date": _day_label(d), "amount": rng.randint(2000, 14999)}
            for d in _trend_days(today)
        ]
        top_selling = [
            {"name": f"Demo Product {i + 1}", "sold_qty": rng.randint(1, 16)}
            for i in range(TOP_SELLING)
        ]
        months = [
            {
                "month": _month_label(today.year, m),
                "sales": rng.randint(100000, 199999),
                "profit": rng.randint(10000, 49999),
                "change": rng.randint(-7, 7),
                "top_product": f"Product {m}",
            }
            for m in range(1, 13)
        ]
        return {
            "stats": stats,
            "sales_trend": sales_trend,
            "top_selling": top_selling,
            "months": months,
        }


ORDER_COLUMNS = ["customer_id", "item_id", "title", "quantity", "price", "created_at"]


class OrderHistoryMetricsSource(MetricsSource):
    """Aggregates orders placed for the shopkeeper's own items."""

    def __init__(self, today=None):
        self.today = today

    def _frame(self, items) -> pd.DataFrame:
        item_ids = [i.id for i in items]
        if not item_ids:
            return pd.DataFrame(columns=ORDER_COLUMNS)
        orders = Order.query.filter(Order.item_id.in_(item_ids)).all()
        rows = [
            (o.shopkeeper_id, o.item_id, o.title, o.quantity, o.price, o.created_at)
            for o in orders
        ]
        return pd.DataFrame(rows, columns=ORDER_COLUMNS)

    def snapshot(self, shopkeeper) -> dict:
        today = self.today or date.today()
        items = list(shopkeeper.items)
        total_stock = int(sum(i.stock or 0 for i in items))
        frame = self._frame(items)

        if frame.empty:
            return {
                "stats": {
                    "total_sales_amount": 0.0,
                    "total_transactions": 0,
                    "total_stock": total_stock,
                    "unique_customers": 0,
                },
                "sales_trend": [
                    {"date": _day_label(d), "amount": 0.0} for d in _trend_days(today)
                ],
                "top_selling": [],
                "months": [
                    {
                        "month": _month_label(today.year, m),
                        "sales": 0.0,
                        "profit": 0.0,
                        "change": 0,
                        "top_product": None,
                    }
                    for m in range(1, 13)
                ],
            }

        costs = {i.id: float(i.cost_price or 0) for i in items}
        frame["amount"] = frame["price"].astype(float) * frame["quantity"].astype(int)
        frame["profit"] = frame["amount"] - frame["item_id"].map(costs) * frame["quantity"]
        created = pd.to_datetime(frame["created_at"])
        frame["day"] = created.dt.date
        frame["year"] = created.dt.year
        frame["month"] = created.dt.month

        daily = frame.groupby("day")["amount"].sum()
        sales_trend = [
            {"date": _day_label(d), "amount": round(float(daily.get(d, 0.0)), 2)}
            for d in _trend_days(today)
        ]

        sold = (
            frame.groupby("title")["quantity"].sum()
            .sort_values(ascending=False, kind="mergesort")
            .head(TOP_SELLING)
        )
        top_selling = [
            {"name": title, "sold_qty": int(qty)} for title, qty in sold.items()
        ]

        return {
            "stats": {
                "total_sales_amount": round(float(frame["amount"].sum()), 2),
                "total_transactions": int(len(frame)),
                "total_stock": total_stock,
                "unique_customers": int(frame["customer_id"].nunique()),
            },
            "sales_trend": sales_trend,
            "top_selling": top_selling,
            "months": self._months(frame, today.year),
        }

    def _months(self, frame, year):
        monthly = frame.groupby(["year", "month"]).agg(
            sales=("amount", "sum"), profit=("profit", "sum")
        )

        def sales_for(y, m):
            if (y, m) in monthly.index:
                return float(monthly.loc[(y, m), "sales"])
            return 0.0

        rows = []
        for m in range(1, 13):
            sales = sales_for(year, m)
            prev = sales_for(year, m - 1) if m > 1 else sales_for(year - 1, 12)
            change = round((sales - prev) / prev * 100) if prev else 0
            in_month = frame[(frame["year"] == year) & (frame["month"] == m)]
            top_product = None
            if not in_month.empty:
                top_product = (
                    in_month.groupby("title")["quantity"].sum()
                    .sort_values(ascending=False, kind="mergesort")
                    .index[0]
                )
            rows.append({
                "month": _month_label(year, m),
                "sales": round(sales, 2),
                "profit": round(float(monthly.loc[(year, m), "profit"]), 2)
                if (year, m) in monthly.index else 0.0,
                "change": int(change),
                "top_product": top_product,
            })
        return rows


def build_metrics_source(config) -> MetricsSource:
    kind = (config.get("DASHBOARD_METRICS_SOURCE") or "random").lower()
    if kind == "random":
        seed = config.get("DASHBOARD_RANDOM_SEED")
        return RandomMetricsSource(seed=int(seed) if seed not in (None, "") else None)
    if kind == "orders":
        return OrderHistoryMetricsSource()
    raise ValueError(f"Unknown dashboard metrics source: {kind}")
