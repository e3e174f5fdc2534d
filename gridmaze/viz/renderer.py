import pygame
from gridmaze.core.grid import Grid

class Renderer:
    COLOR_BG = (10, 10, 10)
    COLOR_WALL = (200, 200, 200)
    COLOR_VISITED = (60, 100, 160)# Blue tint
    COLOR_SCANNED = (100, 150, 200)
    COLOR_SOLUTION = (255, 215, 0)# Gold

    def __init__(self, grid: Grid, generator=None, solver=None, width=1280, height=720):
        self.grid = grid
        self.generator = generator
        self.solver = solver
        self.screen_width = width
        self.screen_height = height

        # Camera
        self.cell_size = 20.0  # Pixels per cell
        self.offset_x = 0.0
        self.offset_y = 0.0
        self.zoom_speed = 1.1

        self.font = None
        self.running = True
        self.clock = None
        self.surface = None
        self.gen_finished = generator is None
        self.solve_finished = solver is None

    def fit_to_screen(self):
        """Auto-adjust zoom and pan to fit the entire grid on screen with padding."""
        padding = 40
        available_w = self.screen_width - (padding * 2)
        available_h = self.screen_height - (padding * 2)

        zoom_x = available_w / self.grid.cols
        zoom_y = available_h / self.grid.rows

        self.cell_size = max(1.0, min(zoom_x, zoom_y))

        # Center
        total_maze_w = self.grid.cols * self.cell_size
        total_maze_h = self.grid.rows * self.cell_size

        self.offset_x = (self.screen_width - total_maze_w) / 2
        self.offset_y = (self.screen_height - total_maze_h) / 2

    def init_window(self):
        pygame.init()
        pygame.display.set_caption(f"Grid Maze - {self.grid.rows}x{self.grid.cols}")
        self.surface = pygame.display.set_mode((self.screen_width, self.screen_height), pygame.RESIZABLE)
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("Consolas", 16)

        self.fit_to_screen()

    def world_to_screen(self, row, col):
        sx = col * self.cell_size + self.offset_x
        sy = row * self.cell_size + self.offset_y
        return sx, sy

    def handle_input(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False

            elif event.type == pygame.VIDEORESIZE:
                self.screen_width, self.screen_height = event.w, event.h

            elif event.type == pygame.MOUSEWHEEL:
                # Zoom towards mouse
                mx, my = pygame.mouse.get_pos()
                wx = (mx - self.offset_x) / self.cell_size
                wy = (my - self.offset_y) / self.cell_size

                if event.y > 0:
                    self.cell_size *= self.zoom_speed
                else:
                    self.cell_size /= self.zoom_speed
                self.cell_size = max(1.0, min(100.0, self.cell_size))

                self.offset_x = mx - wx * self.cell_size
                self.offset_y = my - wy * self.cell_size

            elif event.type == pygame.MOUSEMOTION:
                if pygame.mouse.get_pressed()[0] or pygame.mouse.get_pressed()[2]: # Left or Right drag
                    self.offset_x += event.rel[0]
                    self.offset_y += event.rel[1]

    def draw_grid(self):
        self.surface.fill(self.COLOR_BG)
        size = int(self.cell_size) + 1

        # 1. Backgrounds
        for cell in self.grid:
            px, py = self.world_to_screen(cell.row, cell.col)
            px, py = int(px), int(py)
            if self.solver and self.solver.is_scanned(cell.row, cell.col):
                pygame.draw.rect(self.surface, self.COLOR_SCANNED, (px, py, size, size))
            elif cell.visited:
                pygame.draw.rect(self.surface, self.COLOR_VISITED, (px, py, size, size))

        # 2. Solution path
        if self.solver and self.solver.path:
            for row, col in self.solver.path:
                sx, sy = self.world_to_screen(row, col)
                pygame.draw.rect(self.surface, self.COLOR_SOLUTION, (int(sx), int(sy), size, size))

        # 3. Walls (bottom/right per cell, top/left only on the border)
        if self.cell_size > 4.0:
            wall_color = self.COLOR_WALL
            for cell in self.grid:
                px, py = self.world_to_screen(cell.row, cell.col)
                px, py = int(px), int(py)
                if cell.has_wall(Grid.BOTTOM):
                    pygame.draw.line(self.surface, wall_color, (px, py + size), (px + size, py + size), 1)
                if cell.has_wall(Grid.RIGHT):
                    pygame.draw.line(self.surface, wall_color, (px + size, py), (px + size, py + size), 1)
                if cell.row == 0 and cell.has_wall(Grid.TOP):
                    pygame.draw.line(self.surface, wall_color, (px, py), (px + size, py), 1)
                if cell.col == 0 and cell.has_wall(Grid.LEFT):
                    pygame.draw.line(self.surface, wall_color, (px, py), (px, py + size), 1)

    def draw_hud(self):
        fps = int(self.clock.get_fps())
        if not self.gen_finished:
            status = "Generating"
        elif not self.solve_finished:
            status = "Solving"
        else:
            status = "Done"
        info = [
            f"FPS: {fps}",
            f"Size: {self.grid.rows}x{self.grid.cols} ({len(self.grid):,})",
            f"Status: {status}",
        ]
        if self.solver and self.solver.path:
            info.append(f"Path: {len(self.solver.path)}")

        for i, text in enumerate(info):
            lbl = self.font.render(text, True, (255, 255, 255))
            self.surface.blit(lbl, (10, 10 + i * 20))

    def step(self, gen_iter, solver_iter, gen_steps=20, solve_steps=10):
        """Advances generation, then solving, by a few steps. Returns the live iterators."""
        if gen_iter and not self.gen_finished:
            try:
                for _ in range(gen_steps):
                    next(gen_iter)
            except StopIteration:
                self.gen_finished = True
            return gen_iter, solver_iter

        if solver_iter and not self.solve_finished:
            try:
                for _ in range(solve_steps):
                    next(solver_iter)
            except StopIteration:
                self.solve_finished = True
        return gen_iter, solver_iter

    def run_loop(self, start=None, end=None):
        gen_iter = self.generator.run() if self.generator else None
        solver_iter = None
        if self.solver:
            start = start or self.grid.start.pos
            end = end or self.grid.end.pos
            solver_iter = self.solver.run(start, end)

        while self.running:
            self.handle_input()
            gen_iter, solver_iter = self.step(gen_iter, solver_iter)

            self.draw_grid()
            self.draw_hud()
            pygame.display.flip()
            self.clock.tick(60)

        pygame.quit()
