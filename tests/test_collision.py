from flappy_core.data_models import Bird, CollisionKind, Pipe
from flappy_core.physics_core import check_collisions, circle_rect


def make_pipe(x, gap_y=150.0, gap_height=160.0, width=64.0, height=600.0):
    pipe = Pipe(x=x, gap_y=gap_y, gap_height=gap_height, width=width, view_height=height)
    return pipe


def test_circle_inside_rect_collides():
    assert circle_rect(5, 5, 1, 0, 0, 10, 10)


def test_circle_far_from_rect_misses():
    assert not circle_rect(50, 50, 14, 0, 0, 10, 10)


def test_touching_edge_counts_as_collision():
    assert circle_rect(0, -14, 14, 0, 0, 10, 10)
    assert circle_rect(24, 5, 14, 0, 0, 10, 10)
    assert not circle_rect(25, 5, 14, 0, 0, 10, 10)


def test_corner_uses_exact_distance():
    # Corner at (10, 10), centre at (13, 14): distance 5
    assert circle_rect(13, 14, 5, 0, 0, 10, 10)
    assert not circle_rect(13, 14, 4.9, 0, 0, 10, 10)


def test_ground_contact_is_a_collision():
    bird = Bird(x=120, y=586, radius=14)
    assert check_collisions(bird, 600, []) is CollisionKind.GROUND


def test_just_above_ground_is_safe():
    bird = Bird(x=120, y=585.9, radius=14)
    assert check_collisions(bird, 600, []) is None


def test_ceiling_clamps_instead_of_killing():
    bird = Bird(x=120, y=5, radius=14, vy=-8.2)
    assert check_collisions(bird, 600, []) is None
    assert bird.y == 14
    assert bird.vy == 0.0


def test_pipe_hit_top_and_bottom():
    pipe = make_pipe(x=100)
    assert check_collisions(Bird(x=120, y=140, radius=14), 492, [pipe]) is CollisionKind.PIPE
    assert check_collisions(Bird(x=120, y=320, radius=14), 492, [pipe]) is CollisionKind.PIPE


def test_bird_inside_gap_is_safe():
    pipe = make_pipe(x=100)
    assert check_collisions(Bird(x=120, y=230, radius=14), 492, [pipe]) is None


def test_ground_is_reported_before_pipes():
    pipe = make_pipe(x=100)
    bird = Bird(x=120, y=480, radius=14)
    assert check_collisions(bird, 492, [pipe]) is CollisionKind.GROUND


def test_new_pipe_has_full_bottom_body():
    pipe = Pipe(x=100, gap_y=150, gap_height=160, width=64, view_height=600)
    assert pipe.top.as_tuple() == (100, 0.0, 64, 150)
    assert pipe.bottom.as_tuple() == (100, 310, 64, 290)
    assert check_collisions(Bird(x=130, y=400, radius=14), 492, [pipe]) is CollisionKind.PIPE
