# robaczki/ui/recorder.py
from __future__ import annotations
import os, time
from typing import Optional
import numpy as np

from ..sim.models import CreatureState

_STATE_CODES = {s: i for i, s in enumerate(CreatureState)}

class Recorder:
    """
    Capture snapshots every `stride_frames` for offline playback (NPZ).
    Stores: pos, direction, energy, health, state code per creature, and food positions.
    """
    def __init__(self, enabled=False, stride_frames=2, out_dir="recordings"):
        self.enabled = enabled
        self.stride_frames = max(1, int(stride_frames))
        self.out_dir = out_dir
        self._tick = 0
        self.pos_list = []
        self.dir_list = []
        self.res_list = []
        self.state_list = []
        self.frame_list = []
        self.food_xy_list = []
        self.food_poison_list = []
        self.maxN = 0
        self.maxF = 0

    def toggle(self): self.enabled = not self.enabled; print(f"[Recorder] {'ON' if self.enabled else 'OFF'}")
    def clear(self):
        self._tick = 0
        self.pos_list.clear(); self.dir_list.clear(); self.res_list.clear(); self.state_list.clear()
        self.frame_list.clear(); self.food_xy_list.clear(); self.food_poison_list.clear()
        self.maxN = self.maxF = 0
        print("[Recorder] cleared")

    def __len__(self):
        return len(self.pos_list)

    def maybe_capture(self, world):
        if not self.enabled: return
        self._tick += 1
        if (self._tick % self.stride_frames) != 0: return

        pop = world.creatures
        N = len(pop); self.maxN = max(self.maxN, N)
        pos = np.zeros((N, 2), np.float32)
        direc = np.zeros((N,), np.float32)
        res = np.zeros((N, 2), np.float32)
        state = np.zeros((N,), np.int8)

        for i, c in enumerate(pop):
            pos[i] = (c.x, c.y)
            direc[i] = c.direction
            res[i] = (c.energy_ratio(), c.health_ratio())
            state[i] = _STATE_CODES[c.state]

        self.pos_list.append(pos); self.dir_list.append(direc)
        self.res_list.append(res); self.state_list.append(state)
        self.frame_list.append(world.frame)

        fxy = np.array([(f.x, f.y) for f in world.food], np.float32).reshape(-1, 2)
        self.food_xy_list.append(fxy)
        self.food_poison_list.append(np.array([f.poisonous for f in world.food], np.bool_))
        self.maxF = max(self.maxF, len(fxy))

    def save_npz(self, out_path: Optional[str] = None, world_size=(0.0, 0.0)):
        if not self.pos_list:
            print("[Recorder] nothing to save"); return None

        T = len(self.pos_list); maxN = self.maxN; maxF = self.maxF
        pos   = np.full((T, maxN, 2), np.nan, np.float32)
        direc = np.full((T, maxN), np.nan, np.float32)
        res   = np.full((T, maxN, 2), np.nan, np.float32)
        state = np.full((T, maxN), -1, np.int8)
        frames = np.array(self.frame_list, np.int64)
        fxy   = np.full((T, maxF, 2), np.nan, np.float32)
        fpois = np.zeros((T, maxF), np.bool_)
        fcnt  = np.zeros((T,), np.int32)

        for t in range(T):
            N = self.pos_list[t].shape[0]
            pos[t, :N] = self.pos_list[t]
            direc[t, :N] = self.dir_list[t]
            res[t, :N] = self.res_list[t]
            state[t, :N] = self.state_list[t]
            F = self.food_xy_list[t].shape[0]
            fcnt[t] = F
            if F:
                fxy[t, :F] = self.food_xy_list[t]
                fpois[t, :F] = self.food_poison_list[t]

        if out_path is None:
            os.makedirs(self.out_dir, exist_ok=True)
            stamp = time.strftime("%Y%m%d_%H%M%S")
            out_path = os.path.join(self.out_dir, f"robaczki_{stamp}.npz")

        np.savez_compressed(
            out_path,
            world_size=np.array(world_size, np.float32),
            stride_frames=np.int32(self.stride_frames),
            state_names=np.array([s.value for s in CreatureState]),
            frame=frames,
            pos=pos, direction=direc, resources=res, state=state,
            food_xy=fxy, food_poisonous=fpois, food_count=fcnt,
        )
        print(f"[Recorder] saved: {out_path} (T={T}, maxN={maxN})")
        return out_path
