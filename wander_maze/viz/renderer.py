import pygame
from wander_maze.core.grid import Grid

class Renderer:
    COLOR_BG = (10, 10, 10)
    COLOR_WALL = (200, 200, 200)
    COLOR_ENCLOSED = (40, 40, 40)
    COLOR_EXPLORED = (60, 100, 160)# Blue tint

    def __init__(self, grid: Grid, generator=None, width=1280, height=720, steps_per_frame=1000):
        self.grid = grid
        self.generator = generator
        self.screen_width = width
        self.screen_height = height
        self.steps_per_frame = steps_per_frame

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
        self.status = ""

    def fit_to_screen(self):
        """Auto-adjust zoom and pan to fit the entire grid on screen with padding."""
        padding = 40
        available_w = self.screen_width - (padding * 2)
        available_h = self.screen_height - (padding * 2)

        zoom_x = available_w / self.grid.width
        zoom_y = available_h / self.grid.height

        # Taking minimum zoom to fit both dimensions
        self.cell_size = min(zoom_x, zoom_y)

        # Center
        total_maze_w = self.grid.width * self.cell_size
        total_maze_h = self.grid.height * self.cell_size

        self.offset_x = (self.screen_width - total_maze_w) / 2
        self.offset_y = (self.screen_height - total_maze_h) / 2

    def world_to_screen(self, wx, wy):
        """Top-left pixel of cell (wx, wy). Rows are flipped: y=0 is drawn at the bottom."""
        sx = wx * self.cell_size + self.offset_x
        sy = (self.grid.height - 1 - wy) * self.cell_size + self.offset_y
        return sx, sy

    def screen_to_world(self, sx, sy):
        wx = (sx - self.offset_x) / self.cell_size
        wy = (sy - self.offset_y) / self.cell_size
        return int(wx), self.grid.height - 1 - int(wy)

    def init_window(self):
        pygame.init()
        pygame.display.set_caption(f"Wander Maze - {self.grid.width}x{self.grid.height}")
        self.surface = pygame.display.set_mode((self.screen_width, self.screen_height), pygame.RESIZABLE)
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("Consolas", 16)

        # Initial fit
        self.fit_to_screen()

    def handle_input(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False

            elif event.type == pygame.VIDEORESIZE:
                self.screen_width, self.screen_height = event.w, event.h

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.running = False
                elif event.key == pygame.K_f:
                    self.fit_to_screen()

            elif event.type == pygame.MOUSEWHEEL:
                # Zoom towards mouse
                mx, my = pygame.mouse.get_pos()

                wx = (mx - self.offset_x) / self.cell_size
                wy = (my - self.offset_y) / self.cell_size

                if event.y > 0:
                    self.cell_size *= self.zoom_speed
                else:
                    self.cell_size /= self.zoom_speed

                # Clamp zoom
                self.cell_size = max(0.5, min(200.0, self.cell_size))

                # Adjust offset to keep mouse at same world coord
                self.offset_x = mx - wx * self.cell_size
                self.offset_y = my - wy * self.cell_size

            elif event.type == pygame.MOUSEMOTION:
                if pygame.mouse.get_pressed()[0] or pygame.mouse.get_pressed()[2]: # Left or Right drag
                    self.offset_x += event.rel[0]
                    self.offset_y += event.rel[1]

    def draw_grid(self):
        self.surface.fill(self.COLOR_BG)
        size = int(self.cell_size) + 1
        draw_walls = self.cell_size > 4.0

        for y in range(self.grid.height):
            for x in range(self.grid.width):
                cell = self.grid.cells[y * self.grid.width + x]
                sx, sy = self.world_to_screen(x, y)
                px, py = int(sx), int(sy)

                # Cull off-screen cells
                if px + size < 0 or py + size < 0 or px > self.screen_width or py > self.screen_height:
                    continue

                if (cell & Grid.ALL_WALLS) == Grid.ALL_WALLS:
                    color = self.COLOR_ENCLOSED
                else:
                    color = self.COLOR_EXPLORED
                pygame.draw.rect(self.surface, color, (px, py, size, size))

                if not draw_walls:
                    continue

                # Screen y grows downward, so North is the top edge
                wall_color = self.COLOR_WALL
                if cell & Grid.SOUTH:
                    pygame.draw.line(self.surface, wall_color, (px, py + size), (px + size, py + size), 1)
                if cell & Grid.EAST:
                    pygame.draw.line(self.surface, wall_color, (px + size, py), (px + size, py + size), 1)
                if y == self.grid.height - 1 and (cell & Grid.NORTH):
                    pygame.draw.line(self.surface, wall_color, (px, py), (px + size, py), 1)
                if x == 0 and (cell & Grid.WEST):
                    pygame.draw.line(self.surface, wall_color, (px, py), (px, py + size), 1)

    def draw_hud(self):
        fps = int(self.clock.get_fps())
        cells = self.grid.width * self.grid.height
        status = "Done" if self.gen_finished else (self.status or "Running")
        info = [
            f"FPS: {fps}",
            f"Size: {self.grid.width}x{self.grid.height} ({cells:,})",
            f"Zoom: {self.cell_size:.2f}",
            f"Status: {status}",
        ]
        if self.generator is not None:
            info.append(f"Algo: {self.generator.name} Carved: {self.generator.step_count}")

        for i, text in enumerate(info):
            lbl = self.font.render(text, True, (255, 255, 255))
            self.surface.blit(lbl, (10, 10 + i * 20))

    def step_generator(self, gen_iter):
        """Advances the generator by up to steps_per_frame yields."""
        try:
            for _ in range(self.steps_per_frame):
                self.status = next(gen_iter)
        except StopIteration:
            self.gen_finished = True

    def run_loop(self):
        gen_iter = self.generator.run() if self.generator else None

        while self.running:
            self.handle_input()

            if gen_iter and not self.gen_finished:
                self.step_generator(gen_iter)

            self.draw_grid()
            self.draw_hud()
            pygame.display.flip()

            self.clock.tick(60)

        pygame.quit()
