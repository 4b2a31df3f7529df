import io
from reportlab.lib.pagesizes import A4, landscape
from reportlab.platypus import SimpleDocTemplate, Table, TableStyle, Paragraph, Spacer
from reportlab.lib import colors
from reportlab.lib.styles import getSampleStyleSheet
from mealplan.logic.planning.day_resolver import resolve_to_date
from mealplan.utilities.constants import DATE_FORMAT


def generate_pdf_for_plan(plan):
    """Generate a PDF table: Day / Date / Meal / Cook / Description, one row per meal."""
    buf = io.BytesIO()
    doc = SimpleDocTemplate(
        buf, pagesize=landscape(A4),
        rightMargin=20, leftMargin=20, topMargin=20, bottomMargin=20,
        title=f"Meal Plan {plan.week_start_date.strftime(DATE_FORMAT)}",
    )

    styles = getSampleStyleSheet()
    elements = [
        Paragraph(f"Meal Plan – Week of {plan.week_start_date.strftime(DATE_FORMAT)}", styles["Title"]),
        Spacer(1, 16),
    ]

    data = [["Day", "Date", "Meal", "Cook", "Description"]]
    for day, meals in plan.meals_by_day():
        on_date = resolve_to_date(day, plan.week_start_date).strftime(DATE_FORMAT)
        for meal in meals:
            data.append([str(day), on_date, str(meal.meal_type), meal.cook, meal.description])
    if len(data) == 1:
        data.append(["-", "-", "-", "-", "No meals planned"])

    table = Table(data, repeatRows=1)
    table.setStyle(TableStyle([
        ("BACKGROUND", (0,0), (-1,0), colors.HexColor("#4CAF50")),
        ("TEXTCOLOR", (0,0), (-1,0), colors.whitesmoke),
        ("ALIGN", (0,0), (-1,-1), "CENTER"),
        ("FONTNAME", (0,0), (-1,0), "Helvetica-Bold"),
        ("FONTSIZE", (0,0), (-1,0), 12),
        ("BOTTOMPADDING", (0,0), (-1,0), 10),
        ("GRID", (0,0), (-1,-1), 0.5, colors.grey),
    ]))

    elements.append(table)
    doc.build(elements)
    return buf.getvalue()
