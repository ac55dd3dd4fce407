from snake_ai.dijkstra import dijkstra_path


def can_eat_and_reach_tail(path_to_food, snake, grid, search=dijkstra_path):
    """
    模拟沿 path_to_food 吃到食物后，新蛇头还能不能走到新蛇尾

    参数:
        path_to_food (list): 蛇头到食物的路径，第一个元素是当前蛇头
        snake (list): 蛇身，从尾到头
        grid (Grid): 网格
        search (callable): 最短路算法，默认迪杰斯特拉

    返回:
        bool: 吃完以后还能回到蛇尾返回 True，会被自己困住返回 False

    只在副本上模拟，不会修改真实的蛇身。
    """
    if not path_to_food:
        return False

    # 把路径（去掉当前蛇头）接到蛇身副本后面，得到吃完以后的假想蛇身
    sim_snake = list(snake)
    sim_snake.extend(path_to_food[1:])
    sim_head = sim_snake[-1]
    sim_tail = sim_snake[0]

    # 蛇尾会在下一步让出来，所以不算障碍
    blocked_after = set(sim_snake)
    blocked_after.discard(sim_tail)

    path_after, _ = search(sim_head, sim_tail, blocked_after, grid)
    return bool(path_after)
