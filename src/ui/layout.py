"""
Rejilla de áreas con nombre.

Convierte una plantilla de texto como

    display display history
    seven   eight   history

en rectángulos en píxeles, repartiendo el espacio según fracciones por
columna y por fila.
"""


AREAS = """
    display display display display  history
    clear   bkspc   lparen  rparen   history
    seven   eight   nine    divide   history
    four    five    six     multiply history
    one     two     three   minus    history
    zero    point   equals  plus     history
"""

COLUMN_FRACTIONS = (1, 1, 1, 1, 2)
ROW_FRACTIONS = (2, 2, 2, 2, 2, 2)


def parse_areas(template):
    """
    Convierte la plantilla en una matriz de nombres.

    Raises:
        ValueError: Si la plantilla está vacía o las filas tienen distinto número de columnas
    """
    rows = [line.split() for line in template.strip().splitlines() if line.strip()]
    if not rows:
        raise ValueError("Empty grid template")
    columns = len(rows[0])
    for row in rows:
        if len(row) != columns:
            raise ValueError(f"Grid row has {len(row)} columns, expected {columns}")
    return rows


def _tracks(fractions, start, total):
    """Posiciones de inicio de cada pista más la posición final."""
    unit = total / float(sum(fractions))
    edges = [start]
    for fraction in fractions:
        edges.append(edges[-1] + fraction * unit)
    return [int(round(edge)) for edge in edges]


# ============================================================================
# CLASE: GridLayout
# Propósito: Calcular el rectángulo de cada área de la interfaz
# ============================================================================
class GridLayout:
    """
    Rejilla con áreas con nombre y pistas fraccionarias.

    Cada área debe ocupar un bloque rectangular de celdas.
    """

    def __init__(self, template=AREAS, column_fractions=COLUMN_FRACTIONS,
                 row_fractions=ROW_FRACTIONS):
        self.grid = parse_areas(template)
        if len(column_fractions) != len(self.grid[0]):
            raise ValueError("Column fractions do not match grid columns")
        if len(row_fractions) != len(self.grid):
            raise ValueError("Row fractions do not match grid rows")
        self.column_fractions = tuple(column_fractions)
        self.row_fractions = tuple(row_fractions)
        self.cells = self._collect_cells()
        self.rects = {}

    def _collect_cells(self):
        """Bloque de celdas (fila0, col0, fila1, col1) por área, inclusivo."""
        cells = {}
        for r, row in enumerate(self.grid):
            for c, name in enumerate(row):
                r0, c0, r1, c1 = cells.get(name, (r, c, r, c))
                cells[name] = (min(r0, r), min(c0, c), max(r1, r), max(c1, c))

        for name, (r0, c0, r1, c1) in cells.items():
            for r in range(r0, r1 + 1):
                for c in range(c0, c1 + 1):
                    if self.grid[r][c] != name:
                        raise ValueError(f"Grid area '{name}' is not rectangular")
        return cells

    @property
    def area_names(self):
        return list(self.cells)

    def resize(self, width, height, padding=0):
        """
        Recalcula los rectángulos para un lienzo de width x height píxeles.

        Returns:
            dict: nombre → (x, y, w, h)
        """
        xs = _tracks(self.column_fractions, padding, width - 2 * padding)
        ys = _tracks(self.row_fractions, padding, height - 2 * padding)

        self.rects = {}
        for name, (r0, c0, r1, c1) in self.cells.items():
            x, y = xs[c0], ys[r0]
            self.rects[name] = (x, y, xs[c1 + 1] - x, ys[r1 + 1] - y)
        return self.rects

    def area_at(self, px, py):
        """Nombre del área que contiene el punto (px, py), o None."""
        for name, (x, y, w, h) in self.rects.items():
            if x <= px < x + w and y <= py < y + h:
                return name
        return None
